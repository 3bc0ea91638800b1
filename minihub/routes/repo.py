"""Repository and commit browsing routes for MiniHub"""
from flask import Blueprint, render_template, redirect, url_for, request
from minihub.models import Visibility

repo_bp = Blueprint('repo', __name__)


@repo_bp.route('/')
def repositories_list():
    """List all repositories"""
    from minihub.app import get_hub

    hub = get_hub()
    return render_template(
        'repositories.html',
        repositories=hub.list_repos(),
        visibilities=[v.value for v in Visibility]
    )


@repo_bp.route('/repos', methods=['POST'])
def create_repository():
    """Create a repository from the form on the list page"""
    from minihub.app import get_hub

    hub = get_hub()
    repo = hub.create_repo(
        name=request.form.get('name'),
        description=request.form.get('description', ''),
        owner=request.form.get('owner', ''),
        visibility=request.form.get('visibility', '')
    )
    return redirect(url_for('repo.repo', repo_id=repo.id))


@repo_bp.route('/repo/<repo_id>')
def repo(repo_id):
    """Repository homepage - file list, latest commit and README"""
    from minihub.app import get_hub

    hub = get_hub()
    repo = hub.get_repo(repo_id)
    return render_template(
        'repo.html',
        repo=repo,
        latest_commit=repo.latest_commit,
        commit_count=len(repo.commits),
        readme=hub.get_readme(repo)
    )


@repo_bp.route('/repo/<repo_id>/commits')
def commits(repo_id):
    """Show commit history, newest first"""
    from minihub.app import get_hub

    hub = get_hub()
    return render_template(
        'commits.html',
        repo=hub.get_repo(repo_id),
        commits=hub.list_commits(repo_id)
    )


@repo_bp.route('/repo/<repo_id>/commit/<commit_id>')
def commit_detail(repo_id, commit_id):
    """Show a commit and the files it captured"""
    from minihub.app import get_hub

    hub = get_hub()
    return render_template(
        'commit_detail.html',
        repo=hub.get_repo(repo_id),
        commit=hub.get_commit(repo_id, commit_id)
    )
