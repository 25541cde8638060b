from console.apps.resources import BranchResourceView


class SupplierView(BranchResourceView):
    resource_name = 'supplier'
    cache_key = 'inventorySuppliers'
    list_endpoint = 'get_inventory_suppliers'
    detail_endpoint = 'get_inventory_supplier_by_id'
    create_endpoint = 'create_inventory_supplier'
    update_endpoint = 'update_inventory_supplier'
    delete_endpoint = 'delete_inventory_supplier'
    required_fields = ('name',)
    branch_query_param = 'branchId'
