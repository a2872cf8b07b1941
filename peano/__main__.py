from peano.cli import main

raise SystemExit(main())
