from component.model.state_manager import AppState, app_state

__all__ = ["AppState", "app_state"]
