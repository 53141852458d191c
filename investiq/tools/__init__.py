# Re-export tool modules so `from investiq import tools; tools.analytics...` works.
from . import analytics
from . import bedrock_tool
from . import dynamodb_tool
from . import portfolio_figures
from . import risk_alerts
