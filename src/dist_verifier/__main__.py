from dist_verifier.verify_dist import main

raise SystemExit(main())
