from minischeme.repl import main

raise SystemExit(main())
