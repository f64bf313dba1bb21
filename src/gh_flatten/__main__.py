from gh_flatten.cli import main

raise SystemExit(main())
