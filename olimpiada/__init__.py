"""Solutions to programming olympiad problems, one module per year from 2015 to 2020."""

__version__ = "0.1.0"
__all__ = ["y2015", "y2016", "y2017", "y2018", "y2019", "y2020"]