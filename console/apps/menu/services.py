from console.apps.menu.schemas import CustomerSearchMenu

# orderable menu used to price orders; cleared by every write that changes a price
CUSTOMER_MENU_CACHE_KEY = 'customerSearchMenu'


def fetch_customer_menu(repository, cache, branch_id):
    return cache.fetch(
        [CUSTOMER_MENU_CACHE_KEY, branch_id],
        lambda: repository.call('get_customer_search_menu', path_params={'branchId': branch_id}),
    )


def load_customer_menu(repository, cache, branch_id) -> CustomerSearchMenu:
    """Orderable menu of a branch; raises ApiError when it cannot be fetched"""
    data = fetch_customer_menu(repository, cache, branch_id).raise_for_error()
    return CustomerSearchMenu.model_validate(data or {})
