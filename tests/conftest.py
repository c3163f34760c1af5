from __future__ import annotations

import os

# quizy.main builds the application at import time and refuses to start without a key.
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
