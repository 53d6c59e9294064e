from atansquare.cli import main

raise SystemExit(main())
