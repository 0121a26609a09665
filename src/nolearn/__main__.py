from nolearn.cli.main import main

raise SystemExit(main())
