__title__ = 'kogrammar'
__description__ = 'Korean text tools: NIKL-style romanization of Hangul'
__version__ = '2025.06.02'
__author__ = 'Doug Skrypa'
__author_email__ = 'dskrypa@gmail.com'
