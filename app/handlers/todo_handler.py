from mangum import Mangum

from app.factory import create_app
from app.routers.todo_router import router as todo_router

app = create_app("Todo Lambda", [(todo_router, "/todos", "Todos")])

handler = Mangum(app)
