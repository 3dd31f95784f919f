from cup_tetris.cli import main

raise SystemExit(main())
