from console_core.modules.base import ModulePanel


class PeoplePanel(ModulePanel):
    
    def get_sections(self):
        return [{'key': 'directory', 'label': 'Directory', 'items': []}]


Component = PeoplePanel
