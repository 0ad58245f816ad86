from fastapi import FastAPI
from roombook.infrastructure.config import settings
from roombook.infrastructure.database import Base, engine
from roombook.infrastructure.logger_config import configure_logging
from roombook.infrastructure.models import models  # noqa: F401  registers ReservationModel on Base
from roombook.presentation.exception_handlers import register_exception_handlers
from roombook.presentation.routers import router

configure_logging(settings.log_level)

app = FastAPI(title="roombook")

Base.metadata.create_all(bind=engine)
register_exception_handlers(app)
app.include_router(router)
