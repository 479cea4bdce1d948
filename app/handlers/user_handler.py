from mangum import Mangum

from app.factory import create_app
from app.routers.user_router import router as user_router

app = create_app("User Lambda", [(user_router, "/users", "Users")])

handler = Mangum(app)
