from .convert import x_to_w, w_to_x, x_to_phi, phi_to_x, w_to_phi, phi_to_w
