from flask import Blueprint, request, jsonify

from ..schemas.account_schema import account_schema, accounts_schema, login_schema
from ..services.account_service import (
    check_account,
    complete_profile,
    create_account,
    create_student_account,
    get_accounts,
    register_account,
    update_account,
)

account_blueprint = Blueprint('account_blueprint', __name__)


@account_blueprint.route('/accounts', methods=['GET'])
def list_accounts():
    accounts = get_accounts()
    return jsonify({"success": True, "accounts": accounts_schema.dump(accounts)})


@account_blueprint.route('/accounts', methods=['POST'])
def add_account():
    account = create_account(request.get_json())
    return jsonify({"success": True, "account": account_schema.dump(account)})


@account_blueprint.route('/accounts/register/<string:user_type>', methods=['POST'])
def register(user_type):
    # Self-registration always goes through profile setup afterwards
    account = register_account(user_type, request.get_json() or {})
    return jsonify({"success": True, "account": account_schema.dump(account)})


@account_blueprint.route('/accounts/students', methods=['POST'])
def add_student_account():
    account = create_student_account(request.get_json())
    return jsonify({"success": True, "account": account_schema.dump(account)})


@account_blueprint.route('/accounts/<string:email>', methods=['PUT'])
def update_account_route(email):
    account = update_account(email, request.get_json())
    # Unknown emails are a no-op, not an error
    return jsonify({"success": True, "account": account_schema.dump(account) if account else None})


@account_blueprint.route('/accounts/<string:email>/profile', methods=['PUT'])
def complete_profile_route(email):
    account = complete_profile(email, request.get_json())
    return jsonify({"success": True, "account": account_schema.dump(account) if account else None})


@account_blueprint.route('/login', methods=['POST'])
def login():
    credentials = login_schema.load(request.get_json())
    account = check_account(credentials['email'], credentials['password'], credentials['user_type'])
    return jsonify({"success": True, "account": account_schema.dump(account)})
