from api.routes.contests import ContestController
from api.routes.smart_match import SmartMatchController
from api.routes.solutions import SolutionController

__all__ = ["ContestController", "SmartMatchController", "SolutionController"]
