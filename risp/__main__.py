from risp.cli import main

raise SystemExit(main())
