from flask import Blueprint, request, jsonify

from ..errors import InvalidRequest
from ..schemas.project_schema import project_schema, projects_schema
from ..services.project_service import create_project, delete_project, get_projects, update_project, update_project_members


project_blueprint = Blueprint('project_blueprint', __name__)


@project_blueprint.route('/projects', methods=['GET'])
def list_projects():
    projects = get_projects()
    return jsonify({"success": True, "projects": projects_schema.dump(projects)})


@project_blueprint.route('/projects', methods=['POST'])
def add_project():
    project = create_project(request.get_json())
    return jsonify({"success": True, "project": project_schema.dump(project)})


@project_blueprint.route('/projects/<int:project_id>', methods=['PUT'])
def update_project_route(project_id):
    project = update_project(project_id, request.get_json())
    return jsonify({"success": True, "project": project_schema.dump(project) if project else None})


@project_blueprint.route('/projects/<int:project_id>/members', methods=['PUT'])
def update_members_route(project_id):
    members = (request.get_json() or {}).get('groupMembers')
    if not isinstance(members, list):
        raise InvalidRequest("groupMembers must be a list of names")
    project = update_project_members(project_id, members)
    return jsonify({"success": True, "project": project_schema.dump(project) if project else None})


@project_blueprint.route('/projects/<int:project_id>', methods=['DELETE'])
def delete_project_route(project_id):
    delete_project(project_id)
    return jsonify({"success": True})
