from app.factory import create_app
from app.routers import auth_router, todo_router, user_router

app = create_app(
    "Todo Auth API",
    [
        (auth_router.router, "/auth", "Auth"),
        (user_router.router, "/users", "Users"),
        (todo_router.router, "/todos", "Todos"),
    ],
)
