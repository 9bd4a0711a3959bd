from pokedex.main import main

raise SystemExit(main())
