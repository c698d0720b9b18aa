"""Run the API with uvicorn: ``python -m usersapi``."""
from __future__ import annotations

import uvicorn

from usersapi.core.config import get_settings


def main() -> None:
    settings = get_settings()
    print(f"Servidor: http://localhost:{settings.port}")
    uvicorn.run("usersapi.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
