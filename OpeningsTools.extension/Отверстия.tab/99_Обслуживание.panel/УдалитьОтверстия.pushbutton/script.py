# -*- coding: utf-8 -*-
"""Удаление отверстий, размещённых командой «Создать отверстия».

Отверстия находятся по тегу в параметре «Комментарии».
"""

__title__ = u'Удалить\nотверстия'
__author__ = 'Openings Team'

from pyrevit import forms, revit

import config_loader
import rollback_utils
from utils_revit import alert, log_exception


TOOL_DISPLAY = {
    "DUCT": u"Отверстия под воздуховоды",
    "PIPE": u"Отверстия под трубы",
}

ALL_OPTION = u"--- ВСЕ ОТВЕРСТИЯ ({} шт.) ---"


def _tag_prefix():
    try:
        return config_loader.load_rules().get('comment_tag') or rollback_utils.DEFAULT_TAG_PREFIX
    except Exception:
        log_exception('Failed to load rules')
        return rollback_utils.DEFAULT_TAG_PREFIX


def main():
    doc = revit.doc
    prefix = _tag_prefix()
    tags = rollback_utils.get_unique_tags(doc, prefix=prefix)

    if not tags:
        forms.alert(
            u"Не найдено отверстий с тегом {}.".format(prefix),
            title=u"Нет элементов для удаления",
            warn_icon=False
        )
        return

    total_count = sum(count for _, count in tags)
    options = {}
    for tag, count in tags:
        tool_name = tag.split(":")[1]
        label = u"{} ({} шт.)".format(TOOL_DISPLAY.get(tool_name, tool_name), count)
        options[label] = tool_name
    all_label = ALL_OPTION.format(total_count)

    selected = forms.SelectFromList.show(
        list(options.keys()) + [all_label],
        title=u"Выберите отверстия для удаления",
        button_name=u"Удалить",
        multiselect=True
    )
    if not selected:
        return

    if all_label in selected:
        confirm = forms.alert(
            u"Удалить ВСЕ {} отверстий?\n\n"
            u"Это действие можно отменить через Ctrl+Z до сохранения файла.".format(total_count),
            title=u"Подтверждение удаления",
            yes=True,
            no=True,
            warn_icon=True
        )
        if not confirm:
            return
        deleted = rollback_utils.delete_all_tagged(doc, prefix=prefix)
    else:
        deleted = 0
        for label in selected:
            deleted += rollback_utils.delete_by_tool(doc, options[label], prefix=prefix)

    forms.alert(u"Удалено {} отверстий.".format(deleted), title=u"Готово", warn_icon=False)


if __name__ == '__main__':
    try:
        main()
    except Exception:
        log_exception('Undo openings failed')
        alert(u'Ошибка при удалении отверстий. См. лог pyRevit.')
