from lsviewer.cli import main

raise SystemExit(main())
