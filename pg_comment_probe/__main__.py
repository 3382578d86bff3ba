from pg_comment_probe.demo import main

raise SystemExit(main())
