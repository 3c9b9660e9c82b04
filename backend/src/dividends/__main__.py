from dividends.main import main

raise SystemExit(main())
