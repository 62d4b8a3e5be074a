from pathgraph.cli import main

raise SystemExit(main())
