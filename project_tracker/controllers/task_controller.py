from flask import Blueprint, request, jsonify

from ..schemas.task_schema import task_schema, tasks_schema
from ..services.task_service import create_task, get_tasks, update_task, update_task_status


task_blueprint = Blueprint('task_blueprint', __name__)


@task_blueprint.route('/tasks', methods=['GET'])
def list_tasks():
    tasks = get_tasks(
        project_id=request.args.get('projectId', type=int),
        assignee=request.args.get('assignee'),
    )
    return jsonify({"success": True, "tasks": tasks_schema.dump(tasks)})


@task_blueprint.route('/tasks', methods=['POST'])
def add_task():
    task = create_task(request.get_json())
    return jsonify({"success": True, "task": task_schema.dump(task)})


@task_blueprint.route('/tasks/<int:task_id>', methods=['PUT'])
def update_task_route(task_id):
    task = update_task(task_id, request.get_json())
    return jsonify({"success": True, "task": task_schema.dump(task) if task else None})


@task_blueprint.route('/tasks/<int:task_id>/status', methods=['PUT'])
def update_task_status_route(task_id):
    task = update_task_status(task_id, request.get_json())
    return jsonify({"success": True, "task": task_schema.dump(task) if task else None})
