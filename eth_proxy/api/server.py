"""
eth-proxy API Server

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from eth_proxy import __version__
from eth_proxy.api.config import APIConfig, get_config
from eth_proxy.api.routers import chain_router, health_router
from eth_proxy.core.setup import logger
from eth_proxy.core.types import InvocationFailure
from eth_proxy.etherscan.client import EtherscanClient, create_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    config = get_config()
    logger.info(f"Starting eth-proxy server (version: {config.version})")

    session = create_session()
    app.state.etherscan = EtherscanClient(
        config.ETHERSCAN_DOMAIN, config.ETHERSCAN_API_KEY, session
    )
    logger.info(f"Etherscan client initialized for {config.ETHERSCAN_DOMAIN}")

    try:
        yield
    finally:
        logger.info("Shutting down eth-proxy server...")
        await session.close()
        logger.info("Etherscan session closed")


# Create FastAPI application
app = FastAPI(
    title=APIConfig.APP_NAME,
    description=APIConfig.APP_DESCRIPTION,
    version=__version__,
    lifespan=lifespan,
)

app.include_router(chain_router)
app.include_router(health_router)


@app.exception_handler(InvocationFailure)
async def invocation_failure_handler(request: Request, exc: InvocationFailure):
    """Render an InvocationFailure as ``{"message": ...}`` with its status."""
    logger.warning(
        f"{request.method} {request.url.path} failed: {exc.status} {exc.message}"
    )
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(
        f"Unhandled exception: {str(exc)}",
        exc_info=True,
        extra={
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An internal server error occurred"},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": APIConfig.APP_NAME,
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    from eth_proxy.core.setup import setup_logging, verbosity_from_level_name

    config = get_config()
    setup_logging(verbosity_from_level_name(config.LOG_LEVEL))
    uvicorn.run(
        "eth_proxy.api.server:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )
