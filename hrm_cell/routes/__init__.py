# 资源路由：每个模块一个 Blueprint，由 app.create_app 统一注册
from . import (
    analytics,
    attendance,
    auth,
    contract_labor,
    facilities,
    finance,
    leaves,
    notifications,
    people,
    performance,
    policies,
    self_service,
    surveys,
)

BLUEPRINTS = [
    auth.bp,
    people.bp,
    self_service.bp,
    leaves.bp,
    attendance.bp,
    performance.bp,
    analytics.bp,
    notifications.bp,
    policies.bp,
    finance.bp,
    facilities.bp,
    surveys.bp,
    contract_labor.bp,
]
