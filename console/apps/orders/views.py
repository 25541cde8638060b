from ._views.OrderView import OrderView, OrderStatusView
from ._views.OrderPreviewView import OrderPreviewView
