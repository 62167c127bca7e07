"""Create the admin account from the command line.

    python scripts/create_admin.py <username>

The password is read from the ADMIN_PASSWORD environment variable or prompted for.
"""
import getpass
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blog_backend import create_app  # noqa: E402
from blog_backend.errors import ApiError  # noqa: E402
from blog_backend.services import register_admin  # noqa: E402


def main(argv):
    if len(argv) != 2:
        print(__doc__)
        return 2

    username = argv[1]
    password = os.environ.get('ADMIN_PASSWORD') or getpass.getpass('Admin password: ')

    app = create_app()
    with app.app_context():
        try:
            register_admin(username, password)
        except ApiError as e:
            print(f'Could not create admin: {e.message}')
            return 1
    print(f'Admin {username!r} created')
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
