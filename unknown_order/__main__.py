from unknown_order.cli import main

raise SystemExit(main())
