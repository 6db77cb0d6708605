from __future__ import annotations
from typing import Any, Dict
from flask import Blueprint, current_app, request
from leave_api.errors import ApiError, ReferentialError, ValidationError
from leave_api.models.application import Application
from leave_api.models.employee import Employee
from leave_api.services.application_search import search_applications
from leave_api.services.projections import application_json
from leave_api.store import RecordStore
from leave_api.utils.validation import fits_int64, parse_calendar_date, require_fields

EMPTY_BODY = 'Request body cannot be empty.'
MISSING_FIELDS = 'Missing required fields: leave_start_date, leave_end_date, and employeeId.'
REQUIRED_FIELDS = ('leave_start_date', 'leave_end_date', 'employeeId')


def create_applications_blueprint(store: RecordStore) -> Blueprint:
    applications_bp = Blueprint('applications', __name__)

    @applications_bp.post('')
    def create_applications():
        """Create one or many leave applications.

        Items are handled in order inside a single transaction; the first
        invalid item rejects the whole batch.

        ---
        /applications:
          post:
            summary: Create applications for employee leave
            description: Creates one or multiple leave applications for employees.
            requestBody:
              description: An array of leave application objects, or a single leave application object
              required: true
              content:
                application/json:
                  schema:
                    oneOf:
                      - $ref: '#/components/schemas/ApplicationInput'
                      - type: array
                        items:
                          $ref: '#/components/schemas/ApplicationInput'
            responses:
              201:
                description: Successfully created the application(s).
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/components/schemas/Application'
              400:
                description: Bad request due to missing or invalid fields.
                content:
                  application/json:
                    schema:
                      type: object
                      properties:
                        message:
                          type: string
                          example: "Missing required fields: leave_start_date, leave_end_date, and employeeId."
                        data:
                          $ref: '#/components/schemas/ApplicationInput'
                    examples:
                      missing_fields:
                        summary: Missing required fields
                        value:
                          message: "Missing required fields: leave_start_date, leave_end_date, and employeeId."
                          data:
                            leave_start_date: "2024-11-01"
                            employeeId: 2
                      employee_not_found:
                        summary: Employee not found
                        value:
                          message: "Employee ID 999 does not exist."
        """
        payload = request.get_json(silent=True)
        if not payload:
            raise ValidationError(EMPTY_BODY)
        items = payload if isinstance(payload, list) else [payload]
        try:
            with store.transaction():
                created = [_create_one(store, item) for item in items]
        except ApiError as e:
            current_app.logger.info('Application batch rejected: %s', e.message)
            raise
        return [application_json(a) for a in created], 201

    @applications_bp.get('/search')
    def search():
        """
        ---
        /applications/search:
          get:
            summary: Search applications by employee details
            description: Retrieve a paginated list of applications filtered by employee ID, first name, or last name.
            parameters:
              - name: employeeId
                in: query
                required: false
                description: The unique identifier of the employee.
                schema:
                  type: integer
                  example: 2
              - name: firstName
                in: query
                required: false
                description: The first name of the employee (case-insensitive substring).
                schema:
                  type: string
                  example: "John"
              - name: lastName
                in: query
                required: false
                description: The last name of the employee (case-insensitive substring).
                schema:
                  type: string
                  example: "Doe"
              - name: page
                in: query
                required: false
                description: The page number for pagination (defaults to 1).
                schema:
                  type: integer
                  example: 1
              - name: limit
                in: query
                required: false
                description: The number of results per page (defaults to 10, at most 100).
                schema:
                  type: integer
                  example: 10
            responses:
              200:
                description: A paginated list of applications matching the search criteria.
                content:
                  application/json:
                    schema:
                      type: object
                      properties:
                        data:
                          type: array
                          items:
                            $ref: '#/components/schemas/Application'
                        pagination:
                          $ref: '#/components/schemas/Pagination'
              400:
                description: Bad request due to invalid query parameters.
                content:
                  application/json:
                    schema:
                      type: object
                      properties:
                        message:
                          type: string
                          example: "Invalid query parameters."
        """
        return search_applications(store, request.args)

    return applications_bp


def _create_one(store: RecordStore, item: Any) -> Application:
    data: Dict[str, Any] = require_fields(item, REQUIRED_FIELDS, MISSING_FIELDS)  # type: ignore
    employee_id = data['employeeId']
    employee = None
    if isinstance(employee_id, int) and not isinstance(employee_id, bool) and fits_int64(employee_id):
        employee = store.find_one(Employee, employee_id)
    if not employee:
        raise ReferentialError(f'Employee ID {employee_id} does not exist.')
    return store.create(
        Application,
        leave_start_date=parse_calendar_date(data['leave_start_date'], 'leave_start_date', data),
        leave_end_date=parse_calendar_date(data['leave_end_date'], 'leave_end_date', data),
        employee=employee,
    )
