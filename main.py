"""Run stubmirror against ./InitFile.json from the repository root."""

from stubmirror.mirror_tests import main

if __name__ == "__main__":
    raise SystemExit(main())
