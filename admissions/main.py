from fastapi import FastAPI

from .config import settings
from .logs import configure_logging
from .routers.v1 import router as v1_router

configure_logging(settings)

app = FastAPI(title=settings.app_name)
app.include_router(v1_router)


@app.get("/")
def root():
    return {"message": f"{settings.app_name} is running"}


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    import uvicorn

    uvicorn.run("admissions.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
