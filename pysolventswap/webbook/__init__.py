from .webbook import webbook_antoine_html, parse_title, parse_antoine_rows, pubchem_mw, fetch_component
