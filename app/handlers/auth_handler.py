from mangum import Mangum

from app.factory import create_app
from app.routers.auth_router import router as auth_router

app = create_app("Auth Lambda", [(auth_router, "/auth", "Auth")])

handler = Mangum(app)
