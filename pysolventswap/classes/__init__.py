from .classes import antoine_method, bp_method, swap_status, class_dic
