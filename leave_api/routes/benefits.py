from __future__ import annotations
from flask import Blueprint, current_app
from sqlalchemy.exc import SQLAlchemyError
from leave_api.errors import StoreError
from leave_api.models.benefit import Benefit
from leave_api.services.projections import benefit_json
from leave_api.store import RecordStore


def create_benefits_blueprint(store: RecordStore) -> Blueprint:
    benefits_bp = Blueprint('benefits', __name__)

    @benefits_bp.get('')
    def list_benefits():
        """List every benefit.

        ---
        /benefits:
          get:
            summary: Fetch benefits
            responses:
              200:
                description: Returns a list of Benefits.
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/components/schemas/Benefit'
              400:
                description: The store rejected the query.
                content:
                  application/json:
                    schema:
                      type: object
                      properties:
                        errors:
                          type: array
                          items:
                            type: string
        """
        try:
            rows = store.find_many(Benefit, order_by=(Benefit.id.asc(),))
        except SQLAlchemyError as e:
            current_app.logger.exception('Benefit lookup failed')
            raise StoreError(e)
        return [benefit_json(b) for b in rows]

    return benefits_bp
