"""
Expose the FastAPI application instance.

Importing this module will create a FastAPI application and register
all routes.  The service can be started with:

```sh
python -m coderunner.api
```
"""

from .main import app

__all__ = ["app"]
