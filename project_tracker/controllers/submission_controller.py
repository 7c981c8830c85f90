from flask import Blueprint, request, jsonify

from ..schemas.submission_schema import submission_schema, submissions_schema
from ..services.submission_service import create_submission, delete_submission, get_submissions, review_submission, update_submission


submission_blueprint = Blueprint('submission_blueprint', __name__)


@submission_blueprint.route('/submissions', methods=['GET'])
def list_submissions():
    submissions = get_submissions(
        project_id=request.args.get('projectId', type=int),
        student_id=request.args.get('studentId'),
    )
    return jsonify({"success": True, "submissions": submissions_schema.dump(submissions)})


@submission_blueprint.route('/submissions', methods=['POST'])
def add_submission():
    submission = create_submission(request.get_json())
    return jsonify({"success": True, "submission": submission_schema.dump(submission)})


@submission_blueprint.route('/submissions/<int:submission_id>', methods=['PUT'])
def update_submission_route(submission_id):
    submission = update_submission(submission_id, request.get_json())
    return jsonify({"success": True, "submission": submission_schema.dump(submission) if submission else None})


@submission_blueprint.route('/submissions/<int:submission_id>/review', methods=['PUT'])
def review_submission_route(submission_id):
    submission = review_submission(submission_id, request.get_json())
    return jsonify({"success": True, "submission": submission_schema.dump(submission) if submission else None})


@submission_blueprint.route('/submissions/<int:submission_id>', methods=['DELETE'])
def delete_submission_route(submission_id):
    delete_submission(submission_id)
    return jsonify({"success": True})
