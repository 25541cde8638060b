from console.apps.menu.services import CUSTOMER_MENU_CACHE_KEY
from console.apps.resources import BranchResourceView


class SubMenuItemView(BranchResourceView):
    resource_name = 'sub-menu item'
    cache_key = 'subMenuItems'
    list_endpoint = 'get_sub_menus_by_branch'
    detail_endpoint = 'get_sub_menu_by_id'
    create_endpoint = 'create_sub_menu'
    update_endpoint = 'update_sub_menu'
    delete_endpoint = 'delete_sub_menu'
    invalidates = (CUSTOMER_MENU_CACHE_KEY,)
    required_fields = ('name', 'price')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        try:
            price = float(data['price'])
        except (TypeError, ValueError):
            return "Price must be a number"
        if price < 0:
            return "Price cannot be negative"
        return None
