from localize.main import main

raise SystemExit(main())
