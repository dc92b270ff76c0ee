import uvicorn
from dotenv import load_dotenv

from server import server

load_dotenv()

server_app = server.create_app()


if __name__ == "__main__":
    uvicorn.run("main:server_app", host="0.0.0.0", port=8000)
