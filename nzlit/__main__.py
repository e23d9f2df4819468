from nzlit.compiler.cli import main

raise SystemExit(main())
