from .models import create_business
from .store import Store
from .order import OrderAssembler, assemble_order
from .menu_handler import MenuBuilder

__all__ = ['Store', 'create_business', 'OrderAssembler', 'assemble_order', 'MenuBuilder']
