from mlisp.repl import main

raise SystemExit(main())
