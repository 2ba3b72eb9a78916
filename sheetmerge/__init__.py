"""SheetMerge: consolidate similarly shaped .xlsx workbooks into one."""

__version__ = "0.1.0"
