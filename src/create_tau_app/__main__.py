from create_tau_app.cli.main import main

raise SystemExit(main())
