
import uvicorn

from config.settings import settings

if __name__ == "__main__":
    uvicorn.run("api.server:app", host="0.0.0.0", port=settings.PORT, reload=settings.is_development)
