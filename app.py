"""
Blog Backend
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the blog_backend package.
"""

import os

from blog_backend import create_app
from blog_backend.config import Config, ProductionConfig

config_class = ProductionConfig if os.environ.get('APP_ENV') == 'production' else Config

# Create the Flask application using the factory
app = create_app(config_class)

if __name__ == '__main__':
    app.run(debug=not config_class.IS_PRODUCTION, host='0.0.0.0', port=int(os.environ.get('PORT', 5555)))
