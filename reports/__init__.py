"""Отчеты по прочтению судьбы: текст, PNG-карточка и PDF"""
from .generator import SEPARATOR, ReportGenerator, load_font
from .pdf_generator import PDFGenerator, generate_pdf_report

__all__ = ['ReportGenerator', 'PDFGenerator', 'generate_pdf_report', 'load_font', 'SEPARATOR']
