import os

import uvicorn

from sstviewer import ViewerConfig, configure_logging

if __name__ == "__main__":
    config = ViewerConfig.from_env()
    configure_logging(config.log_level)

    host = os.environ.get("SST_HOST", "0.0.0.0")
    port = int(os.environ.get("SST_PORT", "8000"))

    print("Starting Semantic Spacetime Viewer...")
    print(f"Graph service: {config.service_url}")
    print(f"Viewer available at: http://localhost:{port}/")

    uvicorn.run(
        "sstviewer.api.server:app",
        host=host,
        port=port,
        reload=True
    )
