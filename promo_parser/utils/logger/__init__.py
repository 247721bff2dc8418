from promo_parser.utils.logger.logger import Logger, logger

__all__ = ["Logger", "logger"]
