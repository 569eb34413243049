from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.code import router as code_router
from api.routes.tools import router as tools_router

app = FastAPI(title="Bytebeat Code Tools")

# CORS: allow the editor dev server to call the API
# localhost and 127.0.0.1 are different origins to a browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(code_router)
app.include_router(tools_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
