"""
酒店预订主应用入口
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hotel_app.config import Settings, settings, setup_logging
from hotel_app.dependencies import create_services
from hotel_app.routers import customers, rooms, reservations, admin

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    创建应用

    每个应用实例持有一套独立的服务（app.state.services），
    测试可以传入自定义 Settings 得到互不干扰的实例。
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理"""
        services = app.state.services
        logger.info(
            f"{app_settings.APP_NAME} started "
            f"({len(services.admin_resource.get_all_rooms())} rooms)"
        )
        yield
        logger.info(f"{app_settings.APP_NAME} stopped")

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="酒店房间预订服务：客户注册、查房、预订与管理",
        version="1.0.0",
        debug=app_settings.DEBUG,
        lifespan=lifespan
    )
    app.state.services = create_services(app_settings)

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册路由
    app.include_router(customers.router)
    app.include_router(rooms.router)
    app.include_router(reservations.router)
    app.include_router(admin.router)

    @app.get("/health")
    def health_check():
        """健康检查"""
        return {"status": "healthy", "app": app_settings.APP_NAME}

    return app


def build_app() -> FastAPI:
    """uvicorn 工厂入口：uvicorn hotel_app.main:build_app --factory"""
    setup_logging(settings)
    return create_app(settings)
