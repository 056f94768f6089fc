from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from config.logging_config import setup_logging
from config.settings import settings
from database.db import init_db

# ✅ middleware imports
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ router imports
from routers import auth, courses, professors, ratings

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ✅ CORS (Vue SPA sends the session cookie, so credentials are allowed)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ signed session cookie carrying user_id / user_type
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    https_only=settings.ENV == "prod",
)

# ✅ request latency (X-Latency-Ms response header)
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (consistent JSON error format)
add_error_handlers(app)

# ✅ /api prefix routers
app.include_router(ratings.router,    prefix="/api")
app.include_router(courses.router,    prefix="/api")
app.include_router(professors.router, prefix="/api")
if settings.ENV != "prod":
    app.include_router(auth.router,   prefix="/api")   # dev login only


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


# ✅ root
@app.get("/")
def root():
    return {"message": "ClassPeek API"}
