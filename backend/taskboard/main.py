import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.settings import get_settings
from .exceptions import TaskboardError
from .routers import (
    auth, users, projects, workflow_statuses, tasks, board, comments, reminders,
    employees, clients, calendar_events,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Taskboard API",
    description="Backend API for project boards, tasks and comments",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskboardError)
async def taskboard_error_handler(request: Request, exc: TaskboardError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


# Include routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(workflow_statuses.router)
app.include_router(tasks.router)
app.include_router(board.router)
app.include_router(comments.router)
app.include_router(reminders.router)
app.include_router(employees.router)
app.include_router(clients.router)
app.include_router(calendar_events.router)

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Taskboard API is running"}

@app.get("/")
async def root():
    return {"message": "Welcome to Taskboard API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("taskboard.main:app", host="0.0.0.0", port=8000, reload=True)
