from console.apps.resources import BranchResourceView


class InventoryItemView(BranchResourceView):
    resource_name = 'inventory item'
    cache_key = 'inventoryItems'
    list_endpoint = 'get_inventory_items_by_branch'
    detail_endpoint = 'get_inventory_item_by_id'
    create_endpoint = 'create_inventory_item'
    update_endpoint = 'update_inventory_item'
    delete_endpoint = 'delete_inventory_item'
    required_fields = ('name', 'categoryId', 'unit')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        for field in ('reorderLevel', 'currentStock'):
            if data.get(field) in (None, ''):
                continue
            try:
                value = float(data[field])
            except (TypeError, ValueError):
                return f"{field} must be a number"
            if value < 0:
                return f"{field} cannot be negative"
        return None
