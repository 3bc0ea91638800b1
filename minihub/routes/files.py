"""File editing routes for MiniHub"""
import logging
from flask import Blueprint, render_template, redirect, url_for, request

logger = logging.getLogger(__name__)

files_bp = Blueprint('files', __name__)


@files_bp.route('/repo/<repo_id>/files', methods=['POST'])
def upsert_file(repo_id):
    """Create or update a file and commit the change"""
    from minihub.app import get_hub

    hub = get_hub()
    file = hub.upsert_file(
        repo_id,
        filename=request.form.get('filename'),
        content=request.form.get('content', ''),
        message=request.form.get('message')
    )
    return redirect(url_for('files.file_view', repo_id=repo_id, file_id=file.id))


@files_bp.route('/repo/<repo_id>/file/<file_id>')
def file_view(repo_id, file_id):
    """View the current content of a file"""
    from minihub.app import get_hub

    hub = get_hub()
    return render_template(
        'file.html',
        repo=hub.get_repo(repo_id),
        file=hub.get_file(repo_id, file_id)
    )


@files_bp.route('/repo/<repo_id>/file/<file_id>', methods=['DELETE'])
def delete_file(repo_id, file_id):
    """Delete a file and commit the removal"""
    from minihub.app import get_hub

    hub = get_hub()
    removed = hub.delete_file(repo_id, file_id)
    logger.debug(f"Removed {removed.name}, redirecting to {repo_id}")
    return redirect(url_for('repo.repo', repo_id=repo_id))
