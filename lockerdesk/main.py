import yaml
from fastapi import FastAPI
from lockerdesk.infrastructure.database import Base, engine
from lockerdesk.infrastructure.logging_config import setup_logging
from lockerdesk.presentation.error_handlers import register_error_handlers
from lockerdesk.presentation.routers import router

setup_logging()

app = FastAPI(title="lockerdesk")


# Use the contractual schema
def custom_openapi():
    from lockerdesk.infrastructure.config import settings
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


app.openapi = custom_openapi
Base.metadata.create_all(bind=engine)
register_error_handlers(app)
app.include_router(router)
