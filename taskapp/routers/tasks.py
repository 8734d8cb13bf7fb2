from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from taskapp.core.errors import NotFoundError, ValidationError
from taskapp.domain.tasks import TaskForm
from taskapp.repositories.task_repository import TaskRepository

router = APIRouter(prefix="", tags=["tasks"])


def _get_repository(request: Request) -> TaskRepository:
    repo = getattr(getattr(request.app, "state", None), "task_repository", None)
    if not repo:
        raise RuntimeError("TaskRepository is not configured")
    return repo


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates are not configured")


def _parse_id(raw: str) -> int:
    # Only canonical decimal ids; int() would also take "+3", " 5" or "1_0"
    if not (raw and raw.isascii() and raw.isdigit()):
        raise NotFoundError(raw)
    task_id = int(raw)
    if task_id < 1:
        raise NotFoundError(task_id)
    return task_id


async def _read_form(request: Request) -> TaskForm:
    data = await request.form()
    return TaskForm.from_form({key: str(value) for key, value in data.items()})


def _form_values(request_form) -> dict:
    return {
        "title": (request_form.get("title") or request_form.get("task[title]") or ""),
        "description": (request_form.get("description") or request_form.get("task[description]") or ""),
    }


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request):
    repo = _get_repository(request)
    return _templates(request).TemplateResponse(
        request, "dashboard.html", {"task_count": repo.count()}
    )


@router.get("/tasks", response_class=HTMLResponse)
def list_tasks(request: Request):
    tasks = _get_repository(request).find_all()
    return _templates(request).TemplateResponse(request, "tasks/index.html", {"tasks": tasks})


@router.get("/tasks/new", response_class=HTMLResponse)
def new_task(request: Request):
    return _templates(request).TemplateResponse(
        request, "tasks/new.html", {"values": {"title": "", "description": ""}, "errors": {}}
    )


@router.get("/tasks/{task_id}", response_class=HTMLResponse)
def show_task(request: Request, task_id: str):
    task = _get_repository(request).find_by_id(_parse_id(task_id))
    return _templates(request).TemplateResponse(request, "tasks/show.html", {"task": task})


@router.get("/tasks/{task_id}/edit", response_class=HTMLResponse)
def edit_task(request: Request, task_id: str):
    task = _get_repository(request).find_by_id(_parse_id(task_id))
    values = {"title": task.title, "description": task.description}
    return _templates(request).TemplateResponse(
        request, "tasks/edit.html", {"task": task, "values": values, "errors": {}}
    )


@router.post("/tasks")
async def create_task(request: Request):
    try:
        form = await _read_form(request)
        _get_repository(request).create(form.title, form.description)
    except ValidationError as exc:
        values = _form_values(await request.form())
        return _templates(request).TemplateResponse(
            request,
            "tasks/new.html",
            {"values": values, "errors": exc.errors},
            status_code=400,
        )
    return RedirectResponse("/tasks", status_code=303)


@router.put("/tasks/{task_id}")
async def update_task(request: Request, task_id: str):
    repo = _get_repository(request)
    parsed_id = _parse_id(task_id)
    try:
        form = await _read_form(request)
        repo.update(parsed_id, form.title, form.description)
    except ValidationError as exc:
        task = repo.find_by_id(parsed_id)
        values = _form_values(await request.form())
        return _templates(request).TemplateResponse(
            request,
            "tasks/edit.html",
            {"task": task, "values": values, "errors": exc.errors},
            status_code=400,
        )
    return RedirectResponse(f"/tasks/{parsed_id}", status_code=303)


@router.delete("/tasks/{task_id}")
def delete_task(request: Request, task_id: str):
    try:
        parsed_id = _parse_id(task_id)
    except NotFoundError:
        # Deleting something that cannot exist is still a no-op
        return RedirectResponse("/tasks", status_code=303)
    _get_repository(request).delete(parsed_id)
    return RedirectResponse("/tasks", status_code=303)


@router.post("/tasks/{task_id}")
async def override_task(request: Request, task_id: str):
    """HTML forms only send GET/POST; the hidden ``_method`` field picks the verb."""
    data = await request.form()
    method = str(data.get("_method") or "").strip().upper()
    if method == "PUT":
        return await update_task(request, task_id)
    if method == "DELETE":
        return delete_task(request, task_id)
    raise HTTPException(405, "Method Not Allowed")
