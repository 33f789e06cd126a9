import uvicorn
from shared.config import settings
from services.order_service.main import order_app

app = order_app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
