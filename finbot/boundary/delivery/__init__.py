from finbot.boundary.delivery.delivery_client import DeliveryClient

__all__ = ["DeliveryClient"]
