from .checkout_state_machine import CheckoutStateMachine

__all__ = ['CheckoutStateMachine']
