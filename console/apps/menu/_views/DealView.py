from console.apps.menu.services import CUSTOMER_MENU_CACHE_KEY
from console.apps.resources import BranchResourceView


class DealView(BranchResourceView):
    resource_name = 'deal'
    cache_key = 'deals'
    list_endpoint = 'get_deals_by_branch'
    detail_endpoint = 'get_deal_by_id'
    create_endpoint = 'create_deal'
    update_endpoint = 'update_deal'
    delete_endpoint = 'delete_deal'
    invalidates = (CUSTOMER_MENU_CACHE_KEY,)
    required_fields = ('name', 'price')

    def validate(self, data):
        error = super().validate(data)
        if error:
            return error
        try:
            price = float(data['price'])
        except (TypeError, ValueError):
            return "Deal price must be a number"
        if price < 0:
            return "Deal price cannot be negative"

        # a deal bundles at least one menu item variant or sub-menu item
        menu_items = data.get('menuItems') or []
        sub_items = data.get('subMenuItems') or []
        if not menu_items and not sub_items:
            return "A deal needs at least one menu item or sub-menu item"
        return None
