import uvicorn

from apparel_inventory.config import configure_logging, load_settings


def main():
    settings = load_settings()
    configure_logging(settings)
    uvicorn.run("apparel_inventory.inventory_service:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
