import os
import tempfile

# Keep the attempts ledger out of the working tree; must run before `db` is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="arith-captcha-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'captcha.db')}")
