from unitdeck.main import main

raise SystemExit(main())
