from __future__ import annotations
from flask import Blueprint, request
from leave_api.errors import NotFound, ValidationError
from leave_api.models.employee import Employee
from leave_api.services.projections import employee_json
from leave_api.store import RecordStore
from leave_api.utils.validation import is_blank

EMPLOYEE_NOT_FOUND = 'Employee not found.'
BLANK_NAME = 'lastName can not be blank.'


def create_employees_blueprint(store: RecordStore) -> Blueprint:
    employees_bp = Blueprint('employees', __name__)

    @employees_bp.get('/<int:employee_id>')
    def get_employee(employee_id: int):
        """
        ---
        /employees/{id}:
          get:
            summary: Fetch an employee by id
            parameters:
              - name: id
                in: path
                required: true
                description: The unique identifier of the employee.
                schema:
                  type: integer
                  example: 123
            responses:
              200:
                description: Returns the employee without their secret.
                content:
                  application/json:
                    schema:
                      $ref: '#/components/schemas/Employee'
              404:
                description: Employee not found.
        """
        e = store.find_one(Employee, employee_id)
        if not e:
            raise NotFound(EMPLOYEE_NOT_FOUND)
        return employee_json(e)

    @employees_bp.patch('/<int:employee_id>')
    def update_employee(employee_id: int):
        """Rename an employee. Both names are required.

        ---
        /employees/{id}:
          patch:
            summary: Update employee details
            parameters:
              - name: id
                in: path
                required: true
                description: The unique identifier of the employee.
                schema:
                  type: integer
                  example: 123
            requestBody:
              description: First and last name of the employee
              required: true
              content:
                application/json:
                  schema:
                    type: object
                    properties:
                      firstName:
                        type: string
                        description: The first name of the employee
                        example: "John"
                      lastName:
                        type: string
                        description: The last name of the employee
                        example: "Smith"
            responses:
              200:
                description: Returns the updated employee.
                content:
                  application/json:
                    schema:
                      $ref: '#/components/schemas/Employee'
              400:
                description: A name is missing or blank.
              404:
                description: Employee not found.
        """
        data = request.get_json(silent=True) or {}
        first_name = data.get('firstName') if isinstance(data, dict) else None
        last_name = data.get('lastName') if isinstance(data, dict) else None
        # validated before lookup so unknown ids still get the 400
        if is_blank(first_name) or is_blank(last_name):
            raise ValidationError(BLANK_NAME)
        with store.transaction():
            e = store.find_one(Employee, employee_id)
            if not e:
                raise NotFound(EMPLOYEE_NOT_FOUND)
            store.update(e, first_name=first_name, last_name=last_name)
        return employee_json(e)

    return employees_bp
