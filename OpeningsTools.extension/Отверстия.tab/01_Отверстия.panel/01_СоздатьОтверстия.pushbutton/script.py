# -*- coding: utf-8 -*-
"""Размещает отверстия в стенах АР по пересечениям с воздуховодами и трубами ОВ.

Требуется: открытый файл ОВ, загруженное семейство отверстия
и хотя бы один 3D вид (не шаблон) в активном документе.
"""

__title__ = u'Создать\nотверстия'
__author__ = 'Openings Team'

from pyrevit import revit
from pyrevit import script

import orchestrator
from utils_revit import alert, log_exception


def main():
    doc = revit.doc
    output = script.get_output()
    orchestrator.run_placement(doc, doc.Application, output)


if __name__ == '__main__':
    try:
        main()
    except Exception:
        log_exception('Create openings failed')
        alert(u'Ошибка при размещении отверстий. См. лог pyRevit.')
