from console.apps.branches.schemas import BranchConfiguration
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)


def fetch_branch(repository, cache, branch_id):
    return cache.fetch(
        ['branch', branch_id],
        lambda: repository.call('get_branch_by_id', path_params={'id': branch_id}),
    )


def fetch_branch_configuration(repository, cache, branch_id):
    return cache.fetch(
        ['branchConfiguration', branch_id],
        lambda: repository.call('get_branch_configuration', path_params={'id': branch_id}),
    )


def load_branch_configuration(repository, cache, branch_id) -> BranchConfiguration:
    """
    Pricing policy of a branch.
    Raises ApiError when the API call fails and BranchConfigurationError when
    the record is missing or malformed.
    """
    data = fetch_branch_configuration(repository, cache, branch_id).raise_for_error()
    return BranchConfiguration.from_api(data)


def branch_currency(repository, cache, branch_id, fallback):
    """Branch currency code, or fallback when the branch record has none or cannot be read"""
    api_response = fetch_branch(repository, cache, branch_id)
    if api_response.ok and isinstance(api_response.data, dict) and api_response.data.get('currency'):
        return api_response.data['currency']
    if not api_response.ok:
        logger.warning(f"Could not read currency of branch {branch_id}: {api_response.error}")
    return fallback
