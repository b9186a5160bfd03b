from nutpad.main import main

raise SystemExit(main())
