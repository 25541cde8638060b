"""
Remote API endpoint table.
Symbolic endpoint names mapped to URL templates; {name} placeholders are
filled from path params by ApiRepository.call.
"""

API_ENDPOINTS = {
    # Authentication
    'login': '/api/User/login',
    'refresh_token': '/api/auth/refresh',
    'forgot_password': '/api/User/forgot-password',
    'reset_password': '/api/User/reset-password',

    # Users
    'get_users': '/api/User/users',
    'get_user_by_id': '/api/User/user/{id}',
    'create_user': '/api/User/user',
    'update_user': '/api/User/user',
    'delete_user': '/api/User/user/{id}',
    'update_user_profile': '/api/User/profile',

    # Generic lookups
    'get_currencies': '/api/Generic/currencies',
    'get_timezones': '/api/Generic/timezones',
    'get_order_status_types': '/api/Generic/orderstatustype',
    'get_reservation_status_types': '/api/Generic/reservationstatustype',
    'get_roles': '/api/Generic/roles',
    'get_allergens': '/api/Generic/allergens',

    # Entities
    'get_entities': '/api/Entity',
    'get_entity_by_id': '/api/Entity/{id}',
    'create_entity': '/api/Entity',
    'update_entity': '/api/Entity/{id}',
    'delete_entity': '/api/Entity/{id}',
    'get_entity_primary_color': '/api/Entity/{id}/primary-color',
    'update_entity_primary_color': '/api/Entity/{id}/primary-color',

    # Branches
    'get_branches_by_entity': '/api/Branch/entity/{entityId}',
    'get_branch_by_id': '/api/Branch/{id}',
    'create_branch': '/api/Branch',
    'update_branch': '/api/Branch/{id}',
    'delete_branch': '/api/Branch/{id}',
    'get_branch_configuration': '/api/Branch/{id}/configuration',
    'update_branch_configuration': '/api/Branch/{id}/configuration',

    # Tables (the remote API calls them locations)
    'get_locations_by_branch': '/api/Location/branch/{branchId}',
    'get_location_by_id': '/api/Location/{id}',
    'create_location': '/api/Location',
    'update_location': '/api/Location/{id}',
    'delete_location': '/api/Location/{id}',

    # Menu items
    'get_menu_items_by_branch': '/api/MenuItem/branch/{branchId}',
    'get_menu_items_simple_by_branch': '/api/MenuItem/branch/{branchId}/simple',
    'get_menu_item_by_id': '/api/MenuItem/{id}',
    'create_menu_item': '/api/MenuItem',
    'update_menu_item': '/api/MenuItem/{id}',
    'delete_menu_item': '/api/MenuItem/{id}',
    'update_menu_item_stock_status': '/api/MenuItem/{id}/stock-status',
    'get_menu_items_search': '/api/MenuItem/search/{branchId}',
    'get_customer_search_menu': '/api/customer-search/branch/{branchId}/menu',

    # Sub-menu items
    'get_sub_menus_by_branch': '/api/SubMenuItems/branch/{branchId}',
    'get_sub_menus_simple_by_branch': '/api/SubMenuItems/branch/{branchId}/simple',
    'get_sub_menu_by_id': '/api/SubMenuItems/{id}',
    'create_sub_menu': '/api/SubMenuItems',
    'update_sub_menu': '/api/SubMenuItems/{id}',
    'delete_sub_menu': '/api/SubMenuItems/{id}',

    # Menu categories
    'get_menu_categories_by_branch': '/api/MenuCategory/branch/{branchId}',
    'get_menu_category_by_id': '/api/MenuCategory/{id}',
    'create_menu_category': '/api/MenuCategory',
    'update_menu_category': '/api/MenuCategory/{id}',
    'delete_menu_category': '/api/MenuCategory/{id}',

    # Deals
    'get_deals_by_branch': '/api/Deals/branch/{branchId}',
    'get_deal_by_id': '/api/Deals/{id}',
    'create_deal': '/api/Deals',
    'update_deal': '/api/Deals/{id}',
    'delete_deal': '/api/Deals/{id}',

    # Discounts
    'get_discounts_by_branch': '/api/Discount/branch/{branchId}',
    'get_discount_by_id': '/api/Discount/{id}',
    'create_discount': '/api/Discount',
    'update_discount': '/api/Discount/{id}',
    'delete_discount': '/api/Discount/{id}',
    'bulk_discount_deals': '/api/Deals/bulk-discount',
    'bulk_discount_menu': '/api/MenuItem/bulk-discount',

    # Inventory
    'get_inventory_categories': '/api/inventory/categories',
    'create_inventory_category': '/api/inventory/categories',
    'delete_inventory_category': '/api/inventory/categories/{id}',
    'get_inventory_suppliers': '/api/inventory/suppliers',
    'get_inventory_supplier_by_id': '/api/inventory/suppliers/{id}',
    'create_inventory_supplier': '/api/inventory/suppliers',
    'update_inventory_supplier': '/api/inventory/suppliers/{id}',
    'delete_inventory_supplier': '/api/inventory/suppliers/{id}',
    'get_inventory_items_by_branch': '/api/inventory/items/branch/{branchId}',
    'get_inventory_item_by_id': '/api/inventory/items/{id}',
    'create_inventory_item': '/api/inventory/items',
    'update_inventory_item': '/api/inventory/items/{id}',
    'delete_inventory_item': '/api/inventory/items/{id}',

    # Stock and wastage
    'get_inventory_stock_by_branch': '/api/inventory/branch/{branchId}/stock',
    'update_inventory_stock': '/api/inventory/branch/{branchId}/stock/update',
    'get_inventory_low_stock_by_branch': '/api/inventory/branch/{branchId}/low-stock',
    'get_inventory_wastage': '/api/inventory/wastage',
    'create_inventory_wastage': '/api/inventory/wastage',

    # Purchase orders
    'create_purchase_order': '/api/inventory/purchase-orders',
    'get_purchase_orders_by_branch': '/api/inventory/purchase-orders/branch/{branchId}',
    'get_purchase_order_by_id': '/api/inventory/purchase-orders/{id}',
    'receive_purchase_order': '/api/inventory/purchase-orders/{id}/receive',
    'cancel_purchase_order': '/api/inventory/purchase-orders/{id}/cancel',

    # Recipes
    'get_recipes': '/api/inventory/recipes',
    'get_recipe_by_id': '/api/inventory/recipes/{id}',
    'create_recipe': '/api/inventory/recipes',
    'update_recipe': '/api/inventory/recipes/{id}',
    'delete_recipe': '/api/inventory/recipes/{id}',

    # Orders
    'create_order': '/api/orders',
    'get_order_by_id': '/api/orders/{id}',
    'get_orders_by_branch': '/api/Order/ByBranch',
    'update_order_status': '/api/Order',

    # Reservations
    'get_reservations_by_branch': '/api/Reservations/branch/{branchId}',
    'get_reservation_by_id': '/api/Reservations/{id}',
    'create_reservation': '/api/Reservations',
    'update_reservation': '/api/Reservations/{id}',
    'delete_reservation': '/api/Reservations/{id}',
    'update_reservation_action': '/api/Reservations/{id}/action',
}
