"""Sample data for demonstration."""
import logging

from minihub.core import Hub

logger = logging.getLogger(__name__)

README = """# My Blog

A simple blog application built with Flask.

## Features
- Create and edit posts
- Markdown support
"""


def seed_data(hub: Hub):
    """Create a sample repository with a few commits"""
    logger.info("Creating sample repository...")
    repo = hub.create_repo(
        name='example-blog',
        description='A sample blog application',
        owner='sarah'
    )
    logger.info(f"Created repository: {repo.name} ({repo.id})")

    logger.info("1. Adding README...")
    hub.upsert_file(repo.id, 'README.md', README, 'Add README')

    logger.info("2. Adding app and requirements...")
    hub.upsert_file(repo.id, 'requirements.txt', "flask==3.0.0\nmarkdown==3.5.1\n", 'Add requirements')
    app_file = hub.upsert_file(repo.id, 'app.py', "from flask import Flask\n\napp = Flask(__name__)\n", 'Add app skeleton')

    logger.info("3. Adding a route...")
    hub.upsert_file(
        repo.id,
        'app.py',
        app_file.content + "\n\n@app.route('/')\ndef index():\n    return 'Hello, blog!'\n",
        'Add index route'
    )

    logger.info("4. Adding and removing a scratch file...")
    notes = hub.upsert_file(repo.id, 'NOTES.txt', "remember to add auth\n")
    hub.delete_file(repo.id, notes.id)

    logger.info(f"Seeded {repo.name} with {len(repo.commits)} commits")
    return repo
