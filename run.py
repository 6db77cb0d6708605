"""Development server entry point: python run.py"""
from leave_api import create_app

app = create_app()

if __name__ == '__main__':  # pragma: no cover
    app.logger.info('Server ready at http://localhost:%s (docs at /api-docs)', app.config['PORT'])
    app.run(port=app.config['PORT'])
