# -*- coding: utf-8 -*-
"""Загрузчик конфигурации для Openings Tools.

Загружает правила из JSON конфигурационных файлов с разумными дефолтами.
"""
import io
import json
import os


DEFAULTS = {
    'comment_tag': 'AUTO_OPENING',
    'mechanical_doc_title_keywords': [u'ОВ'],
    'opening_family_type_name': 'Z7_CreateOpenings_Opening',
    'opening_width_param': u'ADSK_Отверстие_Ширина',
    'opening_height_param': u'ADSK_Отверстие_Высота',
    'duct_opening_offset_mm': 150,
    'pipe_opening_offset_mm': 50,
    'opening_existing_dedupe_radius_mm': 50,
    'opening_skip_existing': True,
}


def _extension_root_from_lib():
    """Получить корневую директорию расширения из расположения lib."""
    return os.path.dirname(os.path.dirname(__file__))


def get_default_rules_path():
    """Получить путь к файлу конфигурации по умолчанию."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def load_rules(path=None):
    """Загрузить правила из JSON конфигурационного файла.

    Args:
        path: Путь к JSON конфиг-файлу. Если None, используется дефолтный файл правил.

    Returns:
        Словарь со всеми ключами конфигурации, с применёнными дефолтами.
    """
    rules_path = path or get_default_rules_path()
    try:
        with io.open(rules_path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except ValueError:
        # Файлы, сохранённые в Блокноте, начинаются с BOM
        with open(rules_path, 'rb') as fb:
            raw = fb.read()
        data = json.loads(raw.decode('utf-8-sig'))

    for key, val in DEFAULTS.items():
        if key not in data:
            data[key] = val

    return data
