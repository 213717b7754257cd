"""Task API routes.

Learn: Routes just translate HTTP to TaskService calls. NotFoundError
from the service (missing owner or task) becomes a 404 through the
ServiceError handler registered in main.py.

- POST   /tasks                     → create for user_id (404 if no such user)
- GET    /tasks/{user_id}           → that user's tasks (204 if none)
- PUT    /tasks/update/{task_id}    → replace title/description/completed
- DELETE /tasks/delete/{task_id}    → 204
"""

from fastapi import APIRouter, Depends, Response

from zenith.auth.dependencies import get_task_service
from zenith.schemas.task import TaskCreate, TaskRead, TaskUpdate
from zenith.services.task_service import TaskService

router = APIRouter(prefix="/tasks")


@router.post("", response_model=TaskRead, status_code=201)
async def create_task(
    body: TaskCreate,
    svc: TaskService = Depends(get_task_service),
):
    """Create a task owned by body.user_id."""
    return await svc.create_task(
        title=body.title,
        owner_id=body.user_id,
        description=body.description,
        completed=body.completed,
    )


@router.get(
    "/{user_id}",
    response_model=list[TaskRead],
    responses={204: {"description": "User has no tasks"}},
)
async def list_tasks(
    user_id: int,
    svc: TaskService = Depends(get_task_service),
):
    """List a user's tasks."""
    tasks = await svc.list_tasks_for_owner(user_id)
    if not tasks:
        return Response(status_code=204)
    return tasks


@router.put("/update/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: int,
    body: TaskUpdate,
    svc: TaskService = Depends(get_task_service),
):
    """Update a task. Any user_id in the body is ignored; the owner never changes."""
    return await svc.update_task(task_id, body)


@router.delete("/delete/{task_id}", status_code=204)
async def delete_task(
    task_id: int,
    svc: TaskService = Depends(get_task_service),
):
    await svc.delete_task(task_id)
    return Response(status_code=204)
