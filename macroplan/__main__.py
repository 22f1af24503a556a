"""Run the service: ``python -m macroplan``."""

import os

import uvicorn

if __name__ == "__main__":
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "macroplan.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        reload=os.getenv("ENVIRONMENT") == "development",
    )
