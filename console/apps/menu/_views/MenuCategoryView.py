from console.apps.resources import BranchResourceView


class MenuCategoryView(BranchResourceView):
    resource_name = 'menu category'
    cache_key = 'menuCategories'
    list_endpoint = 'get_menu_categories_by_branch'
    detail_endpoint = 'get_menu_category_by_id'
    create_endpoint = 'create_menu_category'
    update_endpoint = 'update_menu_category'
    delete_endpoint = 'delete_menu_category'
    required_fields = ('name',)
