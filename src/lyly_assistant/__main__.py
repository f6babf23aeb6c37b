"""Run the API with uvicorn: ``python -m lyly_assistant`` or ``lyly-assistant``."""

import uvicorn

from lyly_assistant.configuration import settings


def main() -> None:
    uvicorn.run("lyly_assistant.api.app:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
