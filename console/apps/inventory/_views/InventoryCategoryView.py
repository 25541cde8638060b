from console.apps.resources import BranchResourceView


class InventoryCategoryView(BranchResourceView):
    resource_name = 'inventory category'
    cache_key = 'inventoryCategories'
    list_endpoint = 'get_inventory_categories'
    create_endpoint = 'create_inventory_category'
    delete_endpoint = 'delete_inventory_category'
    required_fields = ('name',)
    branch_query_param = 'BranchId'
