"""Launch the analyzer API under uvicorn."""

import os


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = os.getenv("PORT") or os.getenv("API_PORT", "3000")
    workers = os.getenv("API_WORKERS", "1")

    print(f"Nexus analyzer listening on {host}:{port} ({workers} worker(s))")

    # uvicorn takes over this process and handles SIGTERM itself
    os.execvp(
        "uvicorn",
        ["uvicorn", "api.main:app", "--host", host, "--port", port, "--workers", workers],
    )


if __name__ == "__main__":
    main()
