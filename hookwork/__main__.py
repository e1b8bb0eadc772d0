from hookwork.cli import main

raise SystemExit(main())
