from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cafechronicles.core.config import settings
from cafechronicles.core.log import configure_logging
from cafechronicles.routes.cafes.cafe_routers import cafe_router
from cafechronicles.routes.stamps.stamp_routers import stamp_router

configure_logging()

app = FastAPI(title="Cafe Chronicles Passport API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cafe_router)
app.include_router(stamp_router)


@app.get("/")
def read_root():
    return {"status": "Server is running"}


@app.api_route("/health", methods=["GET", "HEAD"])
def health():
    return {"status": "healthy"}
