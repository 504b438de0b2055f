from skirmish.demo import main

raise SystemExit(main())
